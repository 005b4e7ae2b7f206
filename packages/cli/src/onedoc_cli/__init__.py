"""
OneDoc command line entry point
"""
