"""Calculator version stamped on every priced response."""

VERSION = "2026.10.19"
