"""
Statistics Logic for Localization Manager

Calculates table coverage statistics shown in the info bar.
"""


class LocaleStatistics:
    """Handles statistics calculation for the locale table"""

    @staticmethod
    def is_missing(values, language):
        """A value is missing if the language has no entry or an empty one"""
        return not (values.get(language) or '').strip()

    @staticmethod
    def calculate_statistics(table, languages, pending_edits=0):
        """Calculate key, language and missing value counts"""
        stats = {
            'total_keys': len(table),
            'total_languages': len(languages),
            'pending_edits': pending_edits,
            'missing_values': 0,
            'missing_per_language': {}
        }

        for language in languages:
            missing = sum(
                1 for values in table.values()
                if LocaleStatistics.is_missing(values, language)
            )
            stats['missing_per_language'][language] = missing
            stats['missing_values'] += missing

        return stats

    @staticmethod
    def format_statistics(stats):
        """Build the one-line summary for the info label"""
        parts = [
            f"{stats['total_keys']} key(s)",
            f"{stats['total_languages']} language(s)",
        ]
        missing = [
            f"{language}: {count}"
            for language, count in stats['missing_per_language'].items()
            if count
        ]
        if missing:
            parts.append(f"missing values ({', '.join(missing)})")
        if stats['pending_edits']:
            parts.append(f"{stats['pending_edits']} pending edit(s)")
        return " | ".join(parts)
