from imusim.cli import main

main()
