from nowserver.cli import main

main()
