"""Analytics configuration."""
