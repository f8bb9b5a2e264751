from seasons.app import main

main()
