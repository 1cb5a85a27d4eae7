"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"
        if size_bytes < 1024:
            return f"{size_bytes}B"

        size = float(size_bytes)
        for unit in ["KB", "MB", "GB", "TB", "PB"]:
            size /= 1024
            if size < 1024:
                return f"{size:.2f}{unit}"
        return f"{size / 1024:.2f}EB"

    @staticmethod
    def seconds_to_human(seconds: float) -> str:
        """
        Convert elapsed seconds to a short string (e.g., 0.42s, 2m 05.3s).
        """
        if seconds < 60:
            return f"{seconds:.2f}s"
        minutes, secs = divmod(seconds, 60)
        if minutes < 60:
            return f"{int(minutes)}m {secs:04.1f}s"
        hours, minutes = divmod(minutes, 60)
        return f"{int(hours)}h {int(minutes):02d}m {secs:04.1f}s"
