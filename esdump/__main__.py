from esdump.cli import main

main()
