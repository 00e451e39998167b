"""
API key - Skip the handshake with a login header and key cookie
"""
from pysbss import APIClient


URL = "https://crm.example.com/index.php"


def main():
    with APIClient() as client:
        client.set_api_key("admin", "sbss_key", "0123456789abcdef")
        
        response = client.request("POST", URL, {"async": 1, "cmd": "getUsers"})
        print(client.decode(response))


if __name__ == "__main__":
    main()
