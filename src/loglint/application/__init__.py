"""loglint application layer.

Classification, format validation, rules, services and reporters.
"""
