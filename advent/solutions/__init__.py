"""
Puzzle solutions, one module per day under yearYYYY/dayDD.py. Every module in this
package is imported by `Catalog.register_all`, use `advent newday` to start a new one.
"""
