# /app.py

from upc_checker.cli import main

if __name__ == "__main__":
    main()
