from reactforge.pipeline import main

main()
