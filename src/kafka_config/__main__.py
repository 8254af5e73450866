"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from kafka_config.cli import main

if __name__ == "__main__":
    main()
