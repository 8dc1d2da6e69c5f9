"""
Run with: python -m pocketcalc
"""
from pocketcalc.main import main

if __name__ == "__main__":
    main()
