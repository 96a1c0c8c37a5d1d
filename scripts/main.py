# scripts/main.py

from bouncer.main import main

if __name__ == "__main__":
    main()
