from datetime import date, timedelta
import unittest
from fastapi.testclient import TestClient
from foodsaver.api.api_run import create_app


def date_text(days: int) -> str:
    return (date.today() + timedelta(days=days)).strftime("%d-%m-%Y")


class TestStorageApi(unittest.TestCase):

    def setUp(self):
        # Fresh in-memory stores per test
        self.app = create_app()
        self.client = TestClient(self.app)

    def add(self, name, amount, unit, price, days):
        return self.client.post('/api/storage/ingredient', json={
            'name': name, 'amount': amount, 'unit': unit, 'price': price,
            'expiration_date': date_text(days),
        })

    def test_add_and_merge(self):
        self.assertEqual(self.add('Rice', 2, 'kg', 15.0, 10).status_code, 201)
        resp = self.add('rice', 1, 'kg', 15.0, 10)
        self.assertEqual(resp.status_code, 201)
        bucket = resp.json()['bucket']
        self.assertEqual(len(bucket), 1)
        self.assertEqual(bucket[0]['amount'], 3.0)
        self.assertEqual(bucket[0]['price'], 30.0)

        listing = self.client.get('/api/storage').json()
        self.assertEqual(listing['type_count'], 1)
        self.assertEqual(listing['total_value'], 30.0)
        self.assertIn('rice', listing['ingredients'])

    def test_add_validation(self):
        resp = self.add('Rice', -1, 'kg', 1.0, 10)
        self.assertEqual(resp.status_code, 422)
        resp = self.add('Rice', 1, 'kg', 1.0, -2)
        self.assertEqual(resp.status_code, 422)
        resp = self.client.post('/api/storage/ingredient', json={
            'name': 'Rice', 'amount': 1, 'unit': 'kg', 'price': 1, 'expiration_date': '2030/01/01'})
        self.assertEqual(resp.status_code, 422)

    def test_consume(self):
        self.add('Cheese', 10, 'pcs', 10.0, 5)
        resp = self.client.post('/api/storage/consume', json={'name': 'Cheese', 'amount': 4})
        self.assertEqual(resp.status_code, 200)
        remaining = resp.json()['remaining']
        self.assertAlmostEqual(remaining[0]['amount'], 6.0)
        self.assertAlmostEqual(remaining[0]['price'], 6.0)

    def test_consume_errors_map_to_status(self):
        self.add('Spinach', 100, 'g', 12.0, 2)
        resp = self.client.post('/api/storage/consume', json={'name': 'Spinach', 'amount': 200})
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()['reason'], 'insufficient_quantity')
        self.assertIn('Available: 100.0g', resp.json()['detail'])

        resp = self.client.post('/api/storage/consume', json={'name': 'Saffron', 'amount': 1})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()['reason'], 'not_found')

        resp = self.client.post('/api/storage/consume', json={'name': 'Spinach', 'amount': 0})
        self.assertEqual(resp.status_code, 422)

    def test_search_and_expired(self):
        self.add('Olive Oil', 0.5, 'l', 50.0, 30)
        self.add('Sunflower Oil', 1, 'l', 30.0, 30)
        data = self.client.get('/api/storage/search', params={'q': 'oil'}).json()
        self.assertEqual(data['count'], 2)
        self.assertEqual(self.client.get('/api/storage/search').json()['count'], 0)
        self.assertEqual(self.client.get('/api/storage/search', params={'q': ' '}).json()['count'], 0)
        self.assertEqual(self.client.get('/api/storage/expired').json()['count'], 0)

    def test_report_and_alerts(self):
        self.add('Milk', 0.2, 'l', 4.0, 1)
        report = self.client.get('/api/storage/report').json()
        self.assertEqual(report['type_count'], 1)
        self.assertEqual(report['total_value'], 4.0)
        self.assertEqual(report['expiring_soon'][0]['name'], 'Milk')

        alerts = self.client.get('/api/storage/alerts').json()
        types = {e['type'] for e in alerts['events']}
        self.assertIn('storage.near_expiry', types)
        cursor = alerts['next_cursor']
        self.assertEqual(self.client.get('/api/storage/alerts', params={'since': cursor}).json()['events'], [])

    def test_text_rendering(self):
        self.add('Rice', 1, 'kg', 10.0, 30)
        text = self.client.get('/api/storage/text').json()['text']
        self.assertIn('Ingredient: rice', text)


if __name__ == '__main__':
    unittest.main()
