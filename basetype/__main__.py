from basetype.cmdline import main

main()
