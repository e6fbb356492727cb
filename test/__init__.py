"""
Test suite for hhsim.

Run tests with:
    pytest test/
    pytest test/ -v
    pytest test/ -m "not slow"
"""
