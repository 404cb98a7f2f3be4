from signgrid.cli.run_report import main

if __name__ == "__main__":
    main()
