"""Constants and environment settings for the digest run."""
