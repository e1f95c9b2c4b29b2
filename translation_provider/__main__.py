"""
Main entry point for running as module: python -m translation_provider
"""
from translation_provider.cli.cli_interface import cli

if __name__ == '__main__':
    cli()
