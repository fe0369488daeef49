"""Streamable HTTP transport for the WooCommerce MCP Server"""
