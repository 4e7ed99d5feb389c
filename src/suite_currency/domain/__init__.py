"""Domain value types: numbers, amounts and locales."""
