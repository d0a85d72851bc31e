"""
Predefined configuration presets for common use cases.
"""
from typing import Dict, Any


class ConfigPresets:
    """Collection of predefined configuration presets."""

    @staticmethod
    def library() -> Dict[str, Any]:
        """Quiet defaults for embedding the toolkit in another package."""
        return {
            'validation': {
                'log_failures': False
            },
            'logging': {
                'log_level': 'WARNING',
                'enable_console': False,
                'enable_file': False
            }
        }

    @staticmethod
    def development() -> Dict[str, Any]:
        """Verbose configuration that logs every failed precondition."""
        return {
            'validation': {
                'log_failures': True
            },
            'logging': {
                'log_level': 'DEBUG',
                'enable_console': True,
                'enable_file': False
            }
        }

    @staticmethod
    def production() -> Dict[str, Any]:
        """Structured file logging for services."""
        return {
            'validation': {
                'log_failures': False
            },
            'logging': {
                'log_level': 'INFO',
                'log_dir': 'logs/production',
                'enable_console': True,
                'enable_file': True,
                'enable_structured': True
            }
        }

    @classmethod
    def get(cls, name: str) -> Dict[str, Any]:
        """Look up a preset by name."""
        presets = {
            'library': cls.library,
            'development': cls.development,
            'production': cls.production,
        }
        if name not in presets:
            raise KeyError(f"Unknown preset: {name}. Available: {sorted(presets)}")
        return presets[name]()
