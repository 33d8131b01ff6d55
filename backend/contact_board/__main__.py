from contact_board.main import main

main()
