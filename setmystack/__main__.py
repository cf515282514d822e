from setmystack.pipeline import main

main()
