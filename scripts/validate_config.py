#!/usr/bin/env python3
"""Validate every symbol entry in config/symbols.yaml."""

import sys
from pathlib import Path
from typing import List

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from stockcast.config.loader import ConfigLoader
from stockcast.config.validation import ConfigValidator, ValidationError


def validate_symbol_config(loader: ConfigLoader, symbol: str) -> List[ValidationError]:
    """Validate the merged configuration for one symbol."""
    config = loader.merge_config(symbol)
    return ConfigValidator.validate_config(config)


def configured_symbols(loader: ConfigLoader) -> List[str]:
    """Symbols listed in symbols.yaml."""
    symbols_file = loader.config_dir / "symbols.yaml"
    if not symbols_file.exists():
        return []

    with open(symbols_file) as f:
        data = yaml.safe_load(f) or {}
    return sorted(data.get("symbols", {}) or {})


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating stockcast configuration in {loader.config_dir}...")

    # Unlisted symbols fall back to defaults
    symbols = configured_symbols(loader) + ["UNLISTED"]
    all_valid = True

    for symbol in symbols:
        errors = validate_symbol_config(loader, symbol)

        if errors:
            print(f"❌ {symbol}: {len(errors)} validation errors")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {symbol} configuration is valid")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
