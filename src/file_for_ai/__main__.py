# src/file_for_ai/__main__.py
from file_for_ai.cli import main

if __name__ == "__main__":
    main()
