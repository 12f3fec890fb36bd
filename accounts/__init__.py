"""
Accounts App

Password-based admin login check for the college website backend.
Only the password hash is compared; no sessions or tokens are issued.
"""
