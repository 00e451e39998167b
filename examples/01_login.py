"""
Basic usage - Challenge-response login
"""
import logging

from pysbss import APIClient, AuthRequest, AuthenticationRejectedError


URL = "https://crm.example.com/index.php"


def main():
    logging.basicConfig(level=logging.DEBUG)
    
    with APIClient() as client:
        auth = AuthRequest.create("user1", "password1")
        
        try:
            client.login(URL, auth)
        except AuthenticationRejectedError:
            print("Wrong login or password")
            return
        
        print(f"Authorized: {client.authorized}")
        
        # Already authorized: no request is sent
        client.login(URL, auth)


if __name__ == "__main__":
    main()
