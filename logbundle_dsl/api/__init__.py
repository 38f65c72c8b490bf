"""Generation engine: descriptors in, Java `_impl` sources out."""
