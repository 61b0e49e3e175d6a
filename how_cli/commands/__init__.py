"""
User-facing flows behind the `how` command line: asking a question and
managing the provider configuration.
"""
