"""Embedded ISO 4217 currency table (CLDR 36).

Built once at import and never mutated. Use the accessor functions in
`currency_registry` instead of reading these constants directly.
"""

from suite_currency.domain.monetary.currency_info import CurrencyInfo

# G10 currencies first, then the rest alphabetically
CURRENCY_CODES: tuple[str, ...] = (
    "AUD", "CAD", "CHF", "EUR", "GBP", "JPY", "NOK", "NZD", "SEK", "USD",
    "AED", "AFN", "ALL", "AMD", "ANG", "AOA", "ARS", "AWG", "AZN", "BAM",
    "BBD", "BDT", "BGN", "BHD", "BIF", "BMD", "BND", "BOB", "BRL", "BSD",
    "BTN", "BWP", "BYN", "BZD", "CDF", "CLP", "CNY", "COP", "CRC", "CUC",
    "CUP", "CVE", "CZK", "DJF", "DKK", "DOP", "DZD", "EGP", "ERN", "ETB",
    "FJD", "FKP", "GEL", "GHS", "GIP", "GMD", "GNF", "GTQ", "GYD", "HKD",
    "HNL", "HRK", "HTG", "HUF", "IDR", "ILS", "INR", "IQD", "IRR", "ISK",
    "JMD", "JOD", "KES", "KGS", "KHR", "KMF", "KPW", "KRW", "KWD", "KYD",
    "KZT", "LAK", "LBP", "LKR", "LRD", "LSL", "LYD", "MAD", "MDL", "MGA",
    "MKD", "MMK", "MNT", "MOP", "MRU", "MUR", "MVR", "MWK", "MXN", "MYR",
    "MZN", "NAD", "NGN", "NIO", "NPR", "OMR", "PAB", "PEN", "PGK", "PHP",
    "PKR", "PLN", "PYG", "QAR", "RON", "RSD", "RUB", "RWF", "SAR", "SBD",
    "SCR", "SDG", "SGD", "SHP", "SLL", "SOS", "SRD", "SSP", "STN", "SVC",
    "SYP", "SZL", "THB", "TJS", "TMT", "TND", "TOP", "TRY", "TTD", "TWD",
    "TZS", "UAH", "UGX", "UYU", "UYW", "UZS", "VES", "VND", "VUV", "WST",
    "XAF", "XCD", "XOF", "XPF", "YER", "ZAR", "ZMW", "ZWL",
)

CURRENCIES: dict[str, CurrencyInfo] = {
    "AED": CurrencyInfo("784", 2),
    "AFN": CurrencyInfo("971", 0),
    "ALL": CurrencyInfo("008", 0),
    "AMD": CurrencyInfo("051", 2),
    "ANG": CurrencyInfo("532", 2),
    "AOA": CurrencyInfo("973", 2),
    "ARS": CurrencyInfo("032", 2),
    "AUD": CurrencyInfo("036", 2),
    "AWG": CurrencyInfo("533", 2),
    "AZN": CurrencyInfo("944", 2),
    "BAM": CurrencyInfo("977", 2),
    "BBD": CurrencyInfo("052", 2),
    "BDT": CurrencyInfo("050", 2),
    "BGN": CurrencyInfo("975", 2),
    "BHD": CurrencyInfo("048", 3),
    "BIF": CurrencyInfo("108", 0),
    "BMD": CurrencyInfo("060", 2),
    "BND": CurrencyInfo("096", 2),
    "BOB": CurrencyInfo("068", 2),
    "BRL": CurrencyInfo("986", 2),
    "BSD": CurrencyInfo("044", 2),
    "BTN": CurrencyInfo("064", 2),
    "BWP": CurrencyInfo("072", 2),
    "BYN": CurrencyInfo("933", 2),
    "BZD": CurrencyInfo("084", 2),
    "CAD": CurrencyInfo("124", 2),
    "CDF": CurrencyInfo("976", 2),
    "CHF": CurrencyInfo("756", 2),
    "CLP": CurrencyInfo("152", 0),
    "CNY": CurrencyInfo("156", 2),
    "COP": CurrencyInfo("170", 2),
    "CRC": CurrencyInfo("188", 2),
    "CUC": CurrencyInfo("931", 2),
    "CUP": CurrencyInfo("192", 2),
    "CVE": CurrencyInfo("132", 2),
    "CZK": CurrencyInfo("203", 2),
    "DJF": CurrencyInfo("262", 0),
    "DKK": CurrencyInfo("208", 2),
    "DOP": CurrencyInfo("214", 2),
    "DZD": CurrencyInfo("012", 2),
    "EGP": CurrencyInfo("818", 2),
    "ERN": CurrencyInfo("232", 2),
    "ETB": CurrencyInfo("230", 2),
    "EUR": CurrencyInfo("978", 2),
    "FJD": CurrencyInfo("242", 2),
    "FKP": CurrencyInfo("238", 2),
    "GBP": CurrencyInfo("826", 2),
    "GEL": CurrencyInfo("981", 2),
    "GHS": CurrencyInfo("936", 2),
    "GIP": CurrencyInfo("292", 2),
    "GMD": CurrencyInfo("270", 2),
    "GNF": CurrencyInfo("324", 0),
    "GTQ": CurrencyInfo("320", 2),
    "GYD": CurrencyInfo("328", 2),
    "HKD": CurrencyInfo("344", 2),
    "HNL": CurrencyInfo("340", 2),
    "HRK": CurrencyInfo("191", 2),
    "HTG": CurrencyInfo("332", 2),
    "HUF": CurrencyInfo("348", 2),
    "IDR": CurrencyInfo("360", 2),
    "ILS": CurrencyInfo("376", 2),
    "INR": CurrencyInfo("356", 2),
    "IQD": CurrencyInfo("368", 0),
    "IRR": CurrencyInfo("364", 0),
    "ISK": CurrencyInfo("352", 0),
    "JMD": CurrencyInfo("388", 2),
    "JOD": CurrencyInfo("400", 3),
    "JPY": CurrencyInfo("392", 0),
    "KES": CurrencyInfo("404", 2),
    "KGS": CurrencyInfo("417", 2),
    "KHR": CurrencyInfo("116", 2),
    "KMF": CurrencyInfo("174", 0),
    "KPW": CurrencyInfo("408", 0),
    "KRW": CurrencyInfo("410", 0),
    "KWD": CurrencyInfo("414", 3),
    "KYD": CurrencyInfo("136", 2),
    "KZT": CurrencyInfo("398", 2),
    "LAK": CurrencyInfo("418", 0),
    "LBP": CurrencyInfo("422", 0),
    "LKR": CurrencyInfo("144", 2),
    "LRD": CurrencyInfo("430", 2),
    "LSL": CurrencyInfo("426", 2),
    "LYD": CurrencyInfo("434", 3),
    "MAD": CurrencyInfo("504", 2),
    "MDL": CurrencyInfo("498", 2),
    "MGA": CurrencyInfo("969", 0),
    "MKD": CurrencyInfo("807", 2),
    "MMK": CurrencyInfo("104", 0),
    "MNT": CurrencyInfo("496", 2),
    "MOP": CurrencyInfo("446", 2),
    "MRU": CurrencyInfo("929", 2),
    "MUR": CurrencyInfo("480", 2),
    "MVR": CurrencyInfo("462", 2),
    "MWK": CurrencyInfo("454", 2),
    "MXN": CurrencyInfo("484", 2),
    "MYR": CurrencyInfo("458", 2),
    "MZN": CurrencyInfo("943", 2),
    "NAD": CurrencyInfo("516", 2),
    "NGN": CurrencyInfo("566", 2),
    "NIO": CurrencyInfo("558", 2),
    "NOK": CurrencyInfo("578", 2),
    "NPR": CurrencyInfo("524", 2),
    "NZD": CurrencyInfo("554", 2),
    "OMR": CurrencyInfo("512", 3),
    "PAB": CurrencyInfo("590", 2),
    "PEN": CurrencyInfo("604", 2),
    "PGK": CurrencyInfo("598", 2),
    "PHP": CurrencyInfo("608", 2),
    "PKR": CurrencyInfo("586", 2),
    "PLN": CurrencyInfo("985", 2),
    "PYG": CurrencyInfo("600", 0),
    "QAR": CurrencyInfo("634", 2),
    "RON": CurrencyInfo("946", 2),
    "RSD": CurrencyInfo("941", 0),
    "RUB": CurrencyInfo("643", 2),
    "RWF": CurrencyInfo("646", 0),
    "SAR": CurrencyInfo("682", 2),
    "SBD": CurrencyInfo("090", 2),
    "SCR": CurrencyInfo("690", 2),
    "SDG": CurrencyInfo("938", 2),
    "SEK": CurrencyInfo("752", 2),
    "SGD": CurrencyInfo("702", 2),
    "SHP": CurrencyInfo("654", 2),
    "SLL": CurrencyInfo("694", 0),
    "SOS": CurrencyInfo("706", 0),
    "SRD": CurrencyInfo("968", 2),
    "SSP": CurrencyInfo("728", 2),
    "STN": CurrencyInfo("930", 2),
    "SVC": CurrencyInfo("222", 2),
    "SYP": CurrencyInfo("760", 0),
    "SZL": CurrencyInfo("748", 2),
    "THB": CurrencyInfo("764", 2),
    "TJS": CurrencyInfo("972", 2),
    "TMT": CurrencyInfo("934", 2),
    "TND": CurrencyInfo("788", 3),
    "TOP": CurrencyInfo("776", 2),
    "TRY": CurrencyInfo("949", 2),
    "TTD": CurrencyInfo("780", 2),
    "TWD": CurrencyInfo("901", 2),
    "TZS": CurrencyInfo("834", 2),
    "UAH": CurrencyInfo("980", 2),
    "UGX": CurrencyInfo("800", 0),
    "USD": CurrencyInfo("840", 2),
    "UYU": CurrencyInfo("858", 2),
    "UYW": CurrencyInfo("927", 4),
    "UZS": CurrencyInfo("860", 2),
    "VES": CurrencyInfo("928", 2),
    "VND": CurrencyInfo("704", 0),
    "VUV": CurrencyInfo("548", 0),
    "WST": CurrencyInfo("882", 2),
    "XAF": CurrencyInfo("950", 0),
    "XCD": CurrencyInfo("951", 2),
    "XOF": CurrencyInfo("952", 0),
    "XPF": CurrencyInfo("953", 0),
    "YER": CurrencyInfo("886", 0),
    "ZAR": CurrencyInfo("710", 2),
    "ZMW": CurrencyInfo("967", 2),
    "ZWL": CurrencyInfo("932", 2),
}
