"""CVSS v2 scoring equations"""
