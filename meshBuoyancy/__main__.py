from meshBuoyancy.runner import main

main()
