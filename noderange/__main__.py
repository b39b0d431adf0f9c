from noderange.cli.main import main

main()
