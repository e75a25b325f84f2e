"""CVSS2 command line interface"""
