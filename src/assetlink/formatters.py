from __future__ import annotations


class TextFormatter:
    def link(self, link: str) -> str:
        return f"\nGenerated Link:\n{link}\n\n"

    def listing_header(self, folder: str, count: int) -> str:
        noun = "file" if count == 1 else "files"
        return f'\nFound {count} {noun} in "{folder}":\n\n'

    def listing_entry(self, index: int, name: str, link: str) -> str:
        return f"{index}. {name}\n   {link}\n\n"

    def no_files(self, folder: str) -> str:
        return f'\nNo files found in "{folder}" folder.\n\n'

    def error(self, message: str) -> str:
        return f"Error: {message}\n\n"
