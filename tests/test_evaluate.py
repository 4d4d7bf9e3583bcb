from unittest import TestCase, main

from slide2048.evaluate import evaluate


class TestEvaluate(TestCase):
    def test_random_games_finish(self):
        result = evaluate(games=3, seed=42)

        # ##>: One max tile recorded per game.
        self.assertEqual(sum(result["tiles"].values()), 3)
        self.assertTrue(all(tile >= 4 for tile in result["tiles"]))
        self.assertGreater(result["best"], 0)


if __name__ == "__main__":
    main()
