from post_office.cli import main

main()
