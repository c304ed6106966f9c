"""
Portfolio content API: owned content collections, profile and public portfolio.
"""
