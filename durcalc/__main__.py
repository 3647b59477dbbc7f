from durcalc.cli import main

main()
