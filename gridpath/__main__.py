"""
Entry point for python -m gridpath
"""
from .cli.main import main

if __name__ == '__main__':
    main()
