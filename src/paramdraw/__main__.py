"""Allow `python -m paramdraw`."""
from paramdraw.main import main

if __name__ == "__main__":
    main()
