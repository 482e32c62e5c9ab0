"""
Transposer settings, stored as YAML.

Example transposer.yaml:

    from_key: A
    to_key: C
    sentinel: end
    show_banner: true
    output_format: text
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

from .sources import DEFAULT_SENTINEL


OUTPUT_FORMATS = ('text', 'json')


class ConfigError(ValueError):
    """Raised for a malformed configuration file"""


@dataclass
class TransposerConfig:
    """Defaults for a transposition run; command-line flags override these"""
    from_key: Optional[str] = None
    to_key: Optional[str] = None
    sentinel: str = DEFAULT_SENTINEL
    show_banner: bool = True
    output_format: str = 'text'

    def to_yaml(self) -> str:
        """Serialize to YAML, leaving out unset keys"""
        data = {}
        if self.from_key:
            data['from_key'] = self.from_key
        if self.to_key:
            data['to_key'] = self.to_key
        data['sentinel'] = self.sentinel
        data['show_banner'] = self.show_banner
        data['output_format'] = self.output_format
        return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> 'TransposerConfig':
        """Parse from YAML content; an empty document gives the defaults"""
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}") from e
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Config must be a mapping of setting names to values")

        output_format = data.get('output_format', 'text')
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output_format {output_format!r} (expected one of {', '.join(OUTPUT_FORMATS)})"
            )

        show_banner = data.get('show_banner', True)
        if not isinstance(show_banner, bool):
            raise ConfigError(f"show_banner must be true or false, got {show_banner!r}")

        from_key = data.get('from_key')
        to_key = data.get('to_key')

        return cls(
            from_key=str(from_key) if from_key is not None else None,
            to_key=str(to_key) if to_key is not None else None,
            sentinel=str(data.get('sentinel', DEFAULT_SENTINEL)),
            show_banner=show_banner,
            output_format=output_format,
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'TransposerConfig':
        """Load from a file; a missing file gives the defaults"""
        path = Path(path)
        if not path.exists():
            return cls()
        return cls.from_yaml(path.read_text(encoding='utf-8'))
