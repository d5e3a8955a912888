#!/usr/bin/env python3
"""
Projector launcher (no install needed)

Usage:
  python run.py                       # print every value visible here
  python run.py KEY                   # print one value
  python run.py add KEY VALUE         # set a value on the current directory
  python run.py rmv KEY               # remove a value from the current directory
  python run.py --pwd /some/dir KEY   # resolve from another directory
  python run.py --config store.yaml   # use another store file (JSON or YAML)
"""

from commands.cli import main


if __name__ == "__main__":
    main()
