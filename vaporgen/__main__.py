from vaporgen.cli import main

main()
