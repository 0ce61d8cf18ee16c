"""Étages du solver : s1 surface, s2 validation, s3 résolution, s7 debug."""
