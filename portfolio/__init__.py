"""
Core of the portfolio site: profile data, mock API, session flag and routing.
"""
