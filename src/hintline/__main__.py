from hintline.cli import main

main()
