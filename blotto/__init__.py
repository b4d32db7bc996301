"""
Colonel Blotto tournament scorer.
"""
