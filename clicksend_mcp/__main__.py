from clicksend_mcp.server import main

main()
