from ios_calculator.cli import main

if __name__ == "__main__":
    main()
