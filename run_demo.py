from higherorder.demo import main

if __name__ == "__main__":
    # Set HIGHERORDER_LOG_LEVEL=DEBUG to see every reduce step
    main()
