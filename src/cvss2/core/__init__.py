"""Core metric types, score models and errors"""
