"""Entry point: python -m ccr_config"""

from ccr_config.cli import main

if __name__ == "__main__":
    main()
