from satsort.cli import main

main()
