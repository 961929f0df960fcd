ADMIN_EMAIL = "root@example.com"
ADMIN_PASSWORD = "admin-secret"
AFFILIATE_PASSWORD = "pw-123456"


def login_affiliate(client, email, password=AFFILIATE_PASSWORD):
    return client.post("/login", data={"email": email, "password": password}, follow_redirects=False)


def login_admin(client, email=ADMIN_EMAIL, password=ADMIN_PASSWORD):
    return client.post("/admin/login", data={"email": email, "password": password}, follow_redirects=False)
