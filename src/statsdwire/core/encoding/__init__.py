"""Wire-format encoders."""
