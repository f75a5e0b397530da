from mergecount.bench.runner import main

main()
