"""Vector batch processing"""
