"""Vector string codec"""
