"""IPv4 addresses, a thin TCP socket wrapper and a buffered client."""