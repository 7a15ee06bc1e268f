"""
Request builders and call wrappers for Google Sheets
"""

# can address up to 'ZZZ'
GoogleSheetsMaxColumns = 18278
