from rollr.cli import main

main()
