from vocab_cache.api.app import main

main()
