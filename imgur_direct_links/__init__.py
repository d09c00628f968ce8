"""Direct links of Imgur albums and images."""
