"""
Blueprint package — one sub-package per URL area.
"""
