# tests/test_aluno_routes.py

import json

from fastapi import Depends
from sqlalchemy.orm import Session

from main import app
from smartschool.database import SessionLocal, get_db
from smartschool.models.aluno import Aluno
from smartschool.repository import Repository, get_repo

URL = "/api/v2/aluno"


class RepositorioQueFalha(Repository):
    """Repositório cujo commit sempre falha."""

    def save_changes(self) -> bool:
        self.db.rollback()
        return False


class RepositorioComExclusaoConcorrente(Repository):
    """Outra requisição exclui o aluno entre a leitura e o commit."""

    def save_changes(self) -> bool:
        outra_sessao = SessionLocal()
        try:
            outra_sessao.query(Aluno).delete()
            outra_sessao.commit()
        finally:
            outra_sessao.close()
        return super().save_changes()


def _repositorio_que_falha(db: Session = Depends(get_db)):
    return RepositorioQueFalha(db)


def _repositorio_com_exclusao_concorrente(db: Session = Depends(get_db)):
    return RepositorioComExclusaoConcorrente(db)


def _cadastrar(client, url=URL, **dados):
    corpo = {"matricula": 10, "nome": "Lucas", "sobrenome": "Machado", "telefone": "5656",
             "data_nasc": "2005-07-21"}
    corpo.update(dados)
    response = client.post(url, json=corpo)
    assert response.status_code == 201
    return response.json()


class TestAlunoCrud:
    """CRUD de alunos na versão 2.0."""

    def test_create_and_get_by_id(self, test_client):
        criado = _cadastrar(test_client)

        response = test_client.get(f"{URL}/{criado['id']}")

        assert response.status_code == 200
        dto = response.json()
        assert dto["id"] == criado["id"]
        assert dto["matricula"] == 10
        assert dto["nome"] == "Lucas"
        assert dto["sobrenome"] == "Machado"
        assert dto["data_nasc"] == "2005-07-21"
        assert dto["ativo"] is True
        assert dto["data_fim"] is None

    def test_create_returns_read_dto_with_location(self, test_client):
        response = test_client.post(URL, json={"matricula": 3, "nome": "Laura", "sobrenome": "Antonia"})

        assert response.status_code == 201
        assert response.json()["nome"] == "Laura Antonia"
        assert response.json()["disciplinas"] == []
        assert response.headers["Location"] == f"{URL}/{response.json()['id']}"

    def test_get_missing_aluno(self, test_client):
        response = test_client.get(f"{URL}/999")
        assert response.status_code == 400
        assert response.json() == "Aluno(a) 999 não foi encontrado(a)"

    def test_put_overlays_fields(self, test_client):
        criado = _cadastrar(test_client)
        corpo = {"id": 777, "matricula": 11, "nome": "Lucas", "sobrenome": "Souza", "telefone": "0000"}

        response = test_client.put(f"{URL}/{criado['id']}", json=corpo)

        assert response.status_code == 201
        assert response.json()["id"] == criado["id"]
        assert response.json()["nome"] == "Lucas Souza"
        assert test_client.get(f"{URL}/{criado['id']}").json()["data_nasc"] is None

    def test_put_missing_aluno(self, test_client):
        response = test_client.put(f"{URL}/999", json={"matricula": 1, "nome": "X"})
        assert response.status_code == 400

    def test_delete_then_get(self, test_client, escola):
        response = test_client.delete(f"{URL}/{escola['marta']}")

        assert response.status_code == 200
        assert response.json() == f"Aluno(a) {escola['marta']} deletado com sucesso"
        assert test_client.get(f"{URL}/{escola['marta']}").status_code == 400
        # As matrículas saem junto com o aluno
        assert test_client.get(f"{URL}/ByDisciplina/{escola['ingles']}").status_code == 400

    def test_delete_missing_aluno(self, test_client):
        assert test_client.delete(f"{URL}/999").status_code == 400


class TestTrocarEstado:

    def test_deactivate_and_reactivate(self, test_client):
        aluno_id = _cadastrar(test_client)["id"]

        response = test_client.patch(f"{URL}/{aluno_id}/trocarEstado", json={"Estado": False})
        assert response.status_code == 200
        assert response.json() == {"message": "Aluno(a) Lucas, desativado(a) com sucesso!"}
        dto = test_client.get(f"{URL}/{aluno_id}").json()
        assert dto["ativo"] is False
        assert dto["data_fim"] is not None

        response = test_client.patch(f"{URL}/{aluno_id}/trocarEstado", json={"Estado": True})
        assert response.json() == {"message": "Aluno(a) Lucas, ativado(a) com sucesso!"}
        dto = test_client.get(f"{URL}/{aluno_id}").json()
        assert dto["ativo"] is True
        assert dto["data_fim"] is None

    def test_toggle_twice_to_same_state(self, test_client):
        aluno_id = _cadastrar(test_client)["id"]

        for _ in range(2):
            response = test_client.patch(f"{URL}/{aluno_id}/trocarEstado", json={"Estado": True})
            assert response.status_code == 200
            dto = test_client.get(f"{URL}/{aluno_id}").json()
            assert (dto["ativo"], dto["data_fim"]) == (True, None)

    def test_toggle_missing_aluno(self, test_client):
        response = test_client.patch(f"{URL}/999/trocarEstado", json={"Estado": False})
        assert response.status_code == 400
        assert response.json() == "Aluno(a) 999 não encontrado"

    def test_toggle_requires_estado(self, test_client):
        aluno_id = _cadastrar(test_client)["id"]
        assert test_client.patch(f"{URL}/{aluno_id}/trocarEstado", json={}).status_code == 400


class TestAlunoQueries:

    def test_paged_list(self, test_client):
        for i in range(5):
            _cadastrar(test_client, matricula=i, nome=f"Aluno {i}")

        response = test_client.get(URL, params={"pageNumber": 2, "pageSize": 2})

        assert [a["matricula"] for a in response.json()] == [2, 3]
        paginacao = json.loads(response.headers["Pagination"])
        assert paginacao["totalItems"] == 5
        assert paginacao["totalPages"] == 3

    def test_paged_list_filter_ativo(self, test_client, escola):
        test_client.patch(f"{URL}/{escola['paula']}/trocarEstado", json={"Estado": False})

        response = test_client.get(URL, params={"ativo": "true"})

        assert [a["id"] for a in response.json()] == [escola["marta"]]

    def test_get_all_alunos_includes_professors(self, test_client, escola):
        response = test_client.get(f"{URL}/getAllAlunos")

        assert response.status_code == 200
        marta = response.json()[0]
        assert marta["nome"] == "Marta Kent"
        assert [(d["nome"], d["professor"]) for d in marta["disciplinas"]] == [
            ("Matemática", "Lauro Oliveira"),
            ("Inglês", "Roberto Soares"),
        ]

    def test_by_disciplina(self, test_client, escola):
        response = test_client.get(f"{URL}/ByDisciplina/{escola['fisica']}")

        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == [escola["paula"]]

    def test_by_disciplina_without_students(self, test_client):
        assert test_client.get(f"{URL}/ByDisciplina/999").status_code == 400


class TestAlunoV1:
    URL = "/api/v1/aluno"

    def test_get_by_id_returns_read_dto(self, test_client, escola):
        response = test_client.get(f"{self.URL}/{escola['marta']}")

        assert response.status_code == 200
        assert response.json()["nome"] == "Marta Kent"
        assert response.json()["disciplinas"][0]["nota"] == 8.5

    def test_patch_is_full_update(self, test_client):
        aluno_id = _cadastrar(test_client, url=self.URL)["id"]

        response = test_client.patch(f"{self.URL}/{aluno_id}", json={"matricula": 10, "nome": "Lucas"})

        assert response.status_code == 201
        assert response.json()["nome"] == "Lucas"
        assert response.json()["idade"] is None

    def test_no_state_toggle(self, test_client):
        aluno_id = _cadastrar(test_client, url=self.URL)["id"]
        response = test_client.patch(f"{self.URL}/{aluno_id}/trocarEstado", json={"Estado": False})
        assert response.status_code in (404, 405)


class TestAlunoCommitFailure:
    """Falhas de commit viram 400 com mensagem, nunca 500."""

    def test_create_commit_failure(self, test_client):
        app.dependency_overrides[get_repo] = _repositorio_que_falha

        response = test_client.post(URL, json={"matricula": 1, "nome": "Lucas"})

        assert response.status_code == 400
        assert response.json() == "Aluno(a) Lucas não cadastrado"

    def test_update_commit_failure(self, test_client, escola):
        app.dependency_overrides[get_repo] = _repositorio_que_falha

        response = test_client.put(f"{URL}/{escola['marta']}", json={"matricula": 1, "nome": "Nova"})

        assert response.status_code == 400
        assert response.json() == f"Aluno(a) {escola['marta']} não atualizado"

    def test_trocar_estado_commit_failure(self, test_client, escola):
        app.dependency_overrides[get_repo] = _repositorio_que_falha

        response = test_client.patch(f"{URL}/{escola['marta']}/trocarEstado", json={"Estado": False})

        assert response.status_code == 400
        assert response.json() == "Aluno(a) Marta não atualizado"

    def test_trocar_estado_when_row_removed_before_commit(self, test_client):
        aluno_id = _cadastrar(test_client)["id"]
        app.dependency_overrides[get_repo] = _repositorio_com_exclusao_concorrente

        response = test_client.patch(f"{URL}/{aluno_id}/trocarEstado", json={"Estado": False})

        assert response.status_code == 400
        assert response.json() == "Aluno(a) Lucas não atualizado"

    def test_put_when_row_removed_before_commit(self, test_client):
        aluno_id = _cadastrar(test_client)["id"]
        app.dependency_overrides[get_repo] = _repositorio_com_exclusao_concorrente

        response = test_client.put(f"{URL}/{aluno_id}", json={"matricula": 99, "nome": "Outro"})

        assert response.status_code == 400
        assert response.json() == f"Aluno(a) {aluno_id} não atualizado"

    def test_delete_commit_failure(self, test_client, escola):
        app.dependency_overrides[get_repo] = _repositorio_que_falha

        response = test_client.delete(f"{URL}/{escola['paula']}")

        assert response.status_code == 400
        assert response.json() == "Aluno(a) Paula não deletado(a)"
        app.dependency_overrides.clear()
        assert test_client.get(f"{URL}/{escola['paula']}").status_code == 200
