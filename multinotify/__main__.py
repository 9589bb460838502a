from multinotify.main import main

main()
