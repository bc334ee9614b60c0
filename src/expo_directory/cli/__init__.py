"""
CLI layer for expo-directory.

Commands delegate to the operations layer (``expo_directory.ops``); this
package handles only terminal transport.

Entry point::

    expo-directory --help
"""

from expo_directory.cli.app import app

__all__ = ["app"]
