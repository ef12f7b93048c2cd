"""
재고 API 엔드포인트 통합 테스트

재고 CRUD, 재고 수량 변경, 재고 검색 엔드포인트를 검증합니다.
"""

from inventory_api.models import Inventory


class TestInventoryCrudApi:
    """재고 CRUD API 테스트"""

    def test_create_inventory_success(self, test_client, make_product):
        """Test: 재고 생성 성공 (201)"""
        product = make_product()

        response = test_client.post(
            "/api/v1/inventories", json={"product_id": product.id, "current_stock": 120}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["product_id"] == product.id
        assert data["current_stock"] == 120
        assert data["last_updated"] is not None

    def test_create_inventory_missing_product(self, test_client, test_db):
        """Test: 상품이 없으면 400, 저장하지 않음"""
        response = test_client.post(
            "/api/v1/inventories", json={"product_id": 99, "current_stock": 5}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Product not found with id: 99"
        assert response.json()["error"] == "Invalid Argument"
        assert test_db.query(Inventory).count() == 0

    def test_create_inventory_malformed_json(self, test_client, test_db):
        """Test: 깨진 JSON 본문은 400, 저장하지 않음"""
        response = test_client.post(
            "/api/v1/inventories",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid Request Body"
        assert test_db.query(Inventory).count() == 0

    def test_create_inventory_invalid_stock_type(self, test_client):
        response = test_client.post(
            "/api/v1/inventories", json={"product_id": 1, "current_stock": "many"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Validation Failed"
        assert "current_stock" in response.json()["validation_errors"]

    def test_create_inventory_without_stock(self, test_client, make_product):
        product = make_product()

        response = test_client.post("/api/v1/inventories", json={"product_id": product.id})

        assert response.status_code == 400
        assert response.json()["message"] == "Stock level cannot be null"

    def test_get_inventory(self, test_client, make_product, make_inventory):
        inventory = make_inventory(make_product().id, current_stock=33)

        response = test_client.get(f"/api/v1/inventories/{inventory.id}")

        assert response.status_code == 200
        assert response.json()["current_stock"] == 33
        assert response.json()["last_updated"] == "2025-01-22T10:30:00"

    def test_get_inventory_not_found(self, test_client):
        """Test: 없는 재고 조회 시 404"""
        response = test_client.get("/api/v1/inventories/404")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "Resource Not Found"
        assert data["message"] == "Inventory not found with id: 404"

    def test_list_inventories(self, test_client, make_product, make_inventory):
        make_inventory(make_product(name="A").id, current_stock=1)
        make_inventory(make_product(name="B").id, current_stock=2)

        response = test_client.get("/api/v1/inventories")

        assert [i["current_stock"] for i in response.json()] == [1, 2]

    def test_list_inventories_paged(self, test_client, make_product, make_inventory):
        for stock in (5, 15, 25):
            make_inventory(make_product(name=f"P{stock}").id, current_stock=stock)

        response = test_client.get(
            "/api/v1/inventories/paged", params={"page": 1, "size": 2}
        )

        data = response.json()
        assert [i["current_stock"] for i in data["items"]] == [25]
        assert data["page"] == 1
        assert data["total_elements"] == 3
        assert data["total_pages"] == 2

    def test_update_inventory(self, test_client, make_product, make_inventory):
        inventory = make_inventory(make_product().id, current_stock=10)

        response = test_client.put(
            f"/api/v1/inventories/{inventory.id}", json={"current_stock": 40}
        )

        assert response.status_code == 200
        assert response.json()["current_stock"] == 40
        assert response.json()["product_id"] == inventory.product_id

    def test_update_stock_level(self, test_client, make_product, make_inventory):
        inventory = make_inventory(make_product().id, current_stock=10)

        response = test_client.patch(
            f"/api/v1/inventories/{inventory.id}/stock", json={"current_stock": 80}
        )

        assert response.status_code == 200
        assert response.json()["current_stock"] == 80

    def test_update_stock_level_not_found(self, test_client):
        response = test_client.patch("/api/v1/inventories/77/stock", json={"current_stock": 5})

        assert response.status_code == 404

    def test_update_stock_level_negative(self, test_client, make_product, make_inventory):
        inventory = make_inventory(make_product().id)

        response = test_client.patch(
            f"/api/v1/inventories/{inventory.id}/stock", json={"current_stock": -1}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Stock level cannot be negative"

    def test_delete_inventory(self, test_client, make_product, make_inventory, test_db):
        """Test: 재고 삭제 (204)"""
        inventory = make_inventory(make_product().id)

        response = test_client.delete(f"/api/v1/inventories/{inventory.id}")

        assert response.status_code == 204
        assert test_db.query(Inventory).count() == 0

    def test_delete_inventory_invalid_id(self, test_client):
        response = test_client.delete("/api/v1/inventories/-3")

        assert response.status_code == 400
        assert response.json()["message"] == "Inventory ID must be a positive number"


class TestInventorySearchApi:
    """재고 검색 API 테스트"""

    def test_advanced_search(self, test_client, make_product, make_inventory):
        make_inventory(make_product(name="Low").id, current_stock=3)
        make_inventory(make_product(name="High").id, current_stock=300)

        response = test_client.post(
            "/api/v1/inventories/search/advanced", json={"min_stock": 10, "max_stock": 1000}
        )

        assert response.status_code == 200
        assert [i["current_stock"] for i in response.json()] == [300]

    def test_advanced_search_paged(self, test_client, make_product, make_inventory):
        for stock in (1, 2, 3):
            make_inventory(make_product(name=f"P{stock}").id, current_stock=stock)

        response = test_client.post(
            "/api/v1/inventories/search/advanced/paged",
            params={"size": 2, "sort": "current_stock,desc"},
            json={},
        )

        data = response.json()
        assert [i["current_stock"] for i in data["items"]] == [3, 2]
        assert data["total_pages"] == 2

    def test_search_by_product_id(self, test_client, make_product, make_inventory):
        inventory = make_inventory(make_product().id, current_stock=9)

        response = test_client.get(f"/api/v1/inventories/search/product/{inventory.product_id}")

        assert [i["id"] for i in response.json()] == [inventory.id]

    def test_search_by_stock_range(self, test_client, make_product, make_inventory):
        for stock in (0, 50, 100):
            make_inventory(make_product(name=f"P{stock}").id, current_stock=stock)

        response = test_client.get(
            "/api/v1/inventories/search/stock-range", params={"min_stock": 50}
        )

        assert [i["current_stock"] for i in response.json()] == [50, 100]

    def test_search_by_minimum_stock(self, test_client, make_product, make_inventory):
        for stock in (0, 50, 100):
            make_inventory(make_product(name=f"P{stock}").id, current_stock=stock)

        response = test_client.get(
            "/api/v1/inventories/search/minimum-stock", params={"min_stock": 50}
        )

        assert [i["current_stock"] for i in response.json()] == [100]
