from mdsrc2txt.cli import main

main()
