from x_search_mcp.server.main import main

if __name__ == "__main__":
    main()
