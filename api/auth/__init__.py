"""
Admin authentication: password login and bearer-token verification.
"""
