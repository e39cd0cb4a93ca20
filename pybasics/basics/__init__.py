"""
Language basics: variables, control flow, functions, records, sequences, the
standard library, error handling and concurrency. Every module is a
standalone demo with a ``main()``.
"""
