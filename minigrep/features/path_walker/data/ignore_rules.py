from pathlib import Path

class IgnoreRules:
    """
    Central logic for what entries the walker may skip.
    """

    @staticmethod
    def is_hidden(name: str) -> bool:
        # Dotfiles and dot-directories; "." and ".." never reach here
        return name.startswith(".")

    @classmethod
    def should_ignore(cls, path: Path, include_hidden: bool) -> bool:
        """
        Returns True if the file/folder should be skipped.
        """
        if not include_hidden and cls.is_hidden(path.name):
            return True

        return False
