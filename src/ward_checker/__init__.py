"""Ward Checker: resolve an address and check it against an electoral ward boundary."""
