from repobundle.cli import main

main()
