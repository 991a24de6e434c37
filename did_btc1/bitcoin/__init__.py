"""Bitcoin network parameters and address encodings."""
