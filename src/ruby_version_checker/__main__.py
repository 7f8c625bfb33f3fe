from ruby_version_checker.cli.cli import main

if __name__ == "__main__":
    main()
