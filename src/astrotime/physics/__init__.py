"""Physical constants, bundled data, and the time keeping algorithms built on them."""
