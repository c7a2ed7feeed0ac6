from cloudconfig.main import main

main()
