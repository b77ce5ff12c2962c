"""HTTP reader for a vibedocs corpus."""
