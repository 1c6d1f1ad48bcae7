from neura_os.main import main

main()
