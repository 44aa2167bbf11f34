from backlightd.cli import main

main()
