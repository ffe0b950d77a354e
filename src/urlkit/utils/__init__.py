"""src/urlkit/utils/__init__.py"""
