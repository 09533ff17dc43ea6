"""
Load scenario for the PassOP API: list, save and delete password records.

Run: locust -f locustfile.py --host http://localhost:3000
"""

import random
import uuid

from locust import HttpUser, between, task

SITES = ["https://github.com", "https://mail.example.com", "https://bank.example", "https://news.example"]


class PassopUser(HttpUser):
    wait_time = between(1, 2)

    def on_start(self):
        self.saved = []

    @task(5)
    def list_passwords(self):
        self.client.get("/")

    @task(2)
    def save_password(self):
        record = {
            "site": random.choice(SITES),
            "username": f"user{random.randint(1, 999)}",
            "password": uuid.uuid4().hex[:12],
            "id": str(uuid.uuid4()),
        }
        self.client.post("/", json=record)
        self.saved.append(record)

    @task(1)
    def delete_password(self):
        if not self.saved:
            return
        record = self.saved.pop(random.randrange(len(self.saved)))
        self.client.request("DELETE", "/", json=record, name="DELETE /")
