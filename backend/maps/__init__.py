"""Maps service: reverse-geocodes a coordinate into a postal address."""
