"""
Search & Filter functionality for Localization Manager

Filters the locale table by a query over keys and values.
"""


class SearchFilter:
    """Handles case-insensitive substring filtering of the locale table"""

    @staticmethod
    def matches(text, query):
        """Check if text contains the query, ignoring case"""
        if not text:
            return False
        return query.casefold() in text.casefold()

    @staticmethod
    def entry_matches(key, values, query):
        """Check if a key or any of its values contains the query"""
        if SearchFilter.matches(key, query):
            return True
        return any(SearchFilter.matches(value, query) for value in values.values())

    @staticmethod
    def filter_table(table, query):
        """
        Return the entries matching the query

        An empty query returns the table itself. The result is a new dict view of
        the table and is always recomputed from scratch.
        """
        if not query:
            return table
        return {
            key: values for key, values in table.items()
            if SearchFilter.entry_matches(key, values, query)
        }
